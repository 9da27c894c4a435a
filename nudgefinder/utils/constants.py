"""Constants and default values."""

# Extraction defaults
DEFAULT_MAX_REMINDERS = 5
DEFAULT_MIN_CONFIDENCE = 0.8
CONSERVATIVE_MIN_CONFIDENCE = 0.5

# Default timezone
DEFAULT_TIMEZONE = "UTC"

# Hour assigned to calendar dates mentioned without a clock time
DEFAULT_DUE_HOUR = 9

# Time reference labels
NO_SPECIFIC_TIME = "No specific time"
SPECIFIC_TIME = "Specific time"
NO_TIME_SPECIFIED = "No time specified"

# Consolidation
SIMILARITY_THRESHOLD = 0.7  # Jaccard, within one extraction pass
BATCH_SIMILARITY_THRESHOLD = 0.8  # Jaccard, across chunk results

# Segmentation
MIN_SENTENCE_LENGTH = 10  # Fragments this short or shorter are dropped
DEFAULT_CHUNK_CHARS = 4000
