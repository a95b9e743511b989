"""
Configuration file for the tag cloud builder.
Modify this file to customize layout, rendering and analysis behavior.
"""

# Layout configuration
LAYOUT_CONFIG = {
    "spiral": "square",  # "square" or "archimedean"
    "spiral_step": 3,  # Distance in pixels between neighbouring candidates
    "angle_step": 0.05,  # Largest radians per candidate (archimedean spiral only)
    "max_candidates": 250_000,  # Search ceiling per rectangle
    "max_radius": None,  # Optional radius ceiling in pixels
}

# Cloud configuration
CLOUD_CONFIG = {
    "canvas_width": 1000,
    "canvas_height": 1000,
    "word_count": 70,  # Number of most frequent words to draw
    "font_name": "DejaVuSans.ttf",
    "font_size": 40,  # Font size of the most frequent word
    "font_size_ratio": 5,  # Largest font size / smallest font size
    "color": "black",  # Color of the least frequent word
    "background_color": "white",  # Fill color of the ellipse behind each word
    "image_format": "png",
    "file_name": "Cloud",
    "skip_unplaceable_words": True,  # Skip words that find no room instead of failing
}

# Analysis configuration
ANALYSIS_CONFIG = {
    "case_sensitive": False,  # Whether to consider case in word matching
    "strip_punctuation": True,  # Whether to remove punctuation
    "min_word_length": 1,  # Shorter words are ignored
}

# Stop word configuration
EXCLUSION_CONFIG = {
    "excluded_words_path": "excluded_words.txt",
    "default_excluded_words": [
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "but",
        "by",
        "for",
        "from",
        "in",
        "is",
        "it",
        "of",
        "on",
        "or",
        "that",
        "the",
        "to",
        "was",
        "with",
    ],
}

# Output configuration
OUTPUT_CONFIG = {
    "timing_info": True,  # Show execution time
    "verbose": True,  # Show detailed progress information
}
