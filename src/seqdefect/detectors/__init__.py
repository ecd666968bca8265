from .api import Detector
from .frameshift import detect_frameshifts
from .repeats import detect_repeats
from .bases import detect_non_standard_bases
from .composition import detect_gc_imbalance, detect_ratio_imbalance
from .homopolymer import detect_homopolymers
from .palindrome import detect_palindromes, is_self_complementary

__all__ = [
    "Detector",
    "detect_frameshifts",
    "detect_repeats",
    "detect_non_standard_bases",
    "detect_gc_imbalance",
    "detect_homopolymers",
    "detect_ratio_imbalance",
    "detect_palindromes",
    "is_self_complementary",
]
