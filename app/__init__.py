from flask import Flask, request, g
from dotenv import load_dotenv
from app.config import get_config_class
from app.logging import configure_logging
from app.errors import errors_bp
from app.cli import register_cli
from app.api import register_api_v1
from app.version import API_PREFIX
from app.utils.db import transactional
from app import metrics as app_metrics
from flasgger import Swagger
from prometheus_client import CollectorRegistry
from prometheus_flask_exporter import PrometheusMetrics
import extensions
import logging
import os
import uuid
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator
from app.telemetry import init_tracing
from models import db

SWAGGER_TAGS = [
    {"name": "User", "description": "Sign up, sign in and sign out"},
    {"name": "Customer", "description": "Catalog, cart, checkout and orders"},
    {"name": "Admin", "description": "Catalog, customer and admin management"},
]


def _cors_origins(app):
    allowed = app.config.get("CORS_ALLOWED_ORIGINS", "*")
    if not isinstance(allowed, str):
        return allowed or "*"
    allowed = allowed.strip()
    if allowed == "*":
        return "*"
    return [o.strip() for o in allowed.split(",") if o.strip()]


def _init_docs(app):
    Swagger(
        app,
        config={
            "headers": [],
            "specs": [
                {
                    "endpoint": "apispec",
                    "route": "/apispec.json",
                    "rule_filter": lambda rule: rule.rule.startswith(f"{API_PREFIX}/"),
                    "model_filter": lambda tag: True,
                }
            ],
            "swagger_ui": True,
            "specs_route": "/docs/",
        },
        template={"info": {"title": "Shop API", "version": API_PREFIX.rsplit("/", 1)[-1]}, "tags": SWAGGER_TAGS},
    )


def _init_metrics(app):
    # Tests build several apps per process; give each its own registry.
    registry = CollectorRegistry(auto_describe=True) if app.config.get("TESTING") else None
    metrics = PrometheusMetrics(app, path="/metrics", registry=registry)
    if not app.config.get("TESTING") and not os.environ.get("METRICS_APP_INFO_SET"):
        metrics.info("app_info", "Application info", version="1.0.0")
        os.environ["METRICS_APP_INFO_SET"] = "1"
    app_metrics.init_app(app)


def _register_request_hooks(app):
    @app.before_request
    def _set_request_id():
        incoming = request.headers.get("X-Request-ID")
        g.request_id = (incoming or uuid.uuid4().hex)[:100]
        app.logger.debug(f"request start {request.method} {request.path}")

    @app.after_request
    def _add_request_id_header(resp):
        rid = getattr(g, "request_id", None)
        if rid:
            resp.headers["X-Request-ID"] = rid
        return resp

    @app.after_request
    def _set_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        if request.path.startswith(f"{API_PREFIX}/"):
            # Cart, profile and order payloads are per-user
            resp.headers.setdefault("Cache-Control", "no-store")
        exposed = [h.strip() for h in resp.headers.get("Access-Control-Expose-Headers", "").split(",") if h.strip()]
        for header in ("X-Request-ID", "traceparent"):
            if header not in exposed:
                exposed.append(header)
        resp.headers["Access-Control-Expose-Headers"] = ",".join(exposed)
        return resp

    @app.after_request
    def _add_trace_header(resp):
        carrier = {}
        TraceContextTextMapPropagator().inject(carrier)
        tp = carrier.get("traceparent")
        if tp:
            resp.headers["traceparent"] = tp
        return resp


def _create_schema_and_root_admin(app):
    """Local and test databases are created from the models, not migrations."""
    from app.services.accounts import ensure_root_admin

    with app.app_context():
        db.create_all()
        logging.info("Tables created")
        with transactional("Failed to create root admin"):
            ensure_root_admin()


def create_app(config_object=None):
    """Application factory."""
    load_dotenv()
    app = Flask(__name__)
    app.config.from_object(config_object if config_object is not None else get_config_class())

    configure_logging(app)
    register_cli(app)

    extensions.limiter.init_app(app)
    app.limiter = extensions.limiter
    db.init_app(app)
    extensions.migrate.init_app(app, db)
    extensions.cors.init_app(
        app,
        origins=_cors_origins(app),
        supports_credentials=True,
        expose_headers=["X-Request-ID"],
    )
    _init_docs(app)
    _init_metrics(app)

    app.register_blueprint(errors_bp)
    if app.config.get("TESTING"):
        from app.test_support import test_support_bp
        app.register_blueprint(test_support_bp)
    register_api_v1(app)
    _register_request_hooks(app)

    init_tracing(app)
    if app.config.get("DEBUG") or app.config.get("TESTING"):
        _create_schema_and_root_admin(app)

    @app.route("/health")
    def health():
        return {"status": "ok"}, 200

    return app
