from flask import request
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
import os

# Shared extension instances, bound to the app in create_app().
# Limiter defaults come from RATELIMIT_DEFAULT; /health and /metrics are exempt.
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=os.getenv("RATELIMIT_STORAGE_URL", "memory://"),
    strategy="fixed-window",
    headers_enabled=True,
)
migrate = Migrate(compare_type=True, render_as_batch=True)
cors = CORS()

PROBE_PATHS = ("/health", "/metrics")


@limiter.request_filter
def _skip_probes():
    return request.path in PROBE_PATHS
