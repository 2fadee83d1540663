"""
Configuration constants for the graph search tracer.

Every tunable lives here.  Anything deployment-specific can be
overridden from the environment.
"""

import os
import secrets

# =============================================================================
# Web App Configuration
# =============================================================================

# Flask session signing key; a random one is fine for a single process
SECRET_KEY = os.environ.get("SECRET_KEY") or secrets.token_hex(32)

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "5000"))
DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"

# =============================================================================
# Graph Generation Configuration
# =============================================================================

GRAPH_TYPES = ("random", "preferential", "complete")

DEFAULT_GRAPH_TYPE = "random"
DEFAULT_NUM_NODES = 6
DEFAULT_DENSITY = 0.3

# Inclusive integer bounds for generated edge weights
WEIGHT_RANGE = (1, 10)

# =============================================================================
# Search Configuration
# =============================================================================

DEFAULT_ALGORITHM = "BFS"

# Step budget for a single recorded run.  IDA* on dense graphs can emit
# an enormous number of steps; the recorder stops pulling past this.
MAX_TRACE_STEPS = int(os.environ.get("SEARCH_MAX_TRACE_STEPS", "100000"))

# =============================================================================
# Playback Configuration
# =============================================================================

# Milliseconds between auto-advance ticks
PLAYBACK_SPEED_MS = 800
PLAYBACK_SPEED_MIN_MS = 100
PLAYBACK_SPEED_MAX_MS = 2000

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
