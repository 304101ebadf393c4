"""
Global constants used throughout the project
"""

import logging

# Absent-marker for chain links between partition classes
NO_CLASS = -1

# Position of a vertex that has not been ordered yet
UNPLACED = -1

# Text protocol answers
CHORDAL = "Yes Chordal Graph"
NOT_CHORDAL = "No Chordal Graph"

# CLI logging
LOG_FORMAT = "%(levelname)s | %(message)s"
LOG_LEVEL = logging.INFO
