"""Request capacity constraints for the Trello sessions endpoint.

This module defines the default timeouts and fan-out width used when talking
to the Trello REST API, plus the bounds that environment overrides are
clamped to.

These limits are enforced by the sessions flow (src.core.sessions_flow) and
the bounded fan-out controller, NOT by the Trello service helpers, which
stay thin wrappers around single HTTP calls.
"""

# Timeout, in seconds, applied to every individual Trello HTTP call.
#
# Trello usually answers in well under a second; 15s matches the timeout the
# other Trello helpers in this codebase have always used.
DEFAULT_REQUEST_TIMEOUT = 15.0

# Maximum time, in seconds, the whole per-card enrichment batch may take.
# If exceeded the request fails instead of returning partial results.
DEFAULT_BATCH_TIMEOUT = 30.0

# Number of list-name lookups allowed in flight at the same time.
#
# Keep concurrency modest to reduce rate-limit spikes on boards with many cards.
DEFAULT_MAX_CONCURRENCY = 10

# Bounds for environment overrides.
MIN_TIMEOUT = 1.0
MAX_TIMEOUT = 120.0
MIN_CONCURRENCY = 1
MAX_CONCURRENCY = 50
