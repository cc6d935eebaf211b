from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SimpleSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.flask import FlaskInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.propagate import set_global_textmap
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from models import db

_provider_installed = False


def init_tracing(app):
    """Initialize OpenTelemetry tracing for the Flask app."""
    global _provider_installed
    service_name = app.config.get("OTEL_SERVICE_NAME", "shop-backend")
    endpoint = app.config.get("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318/v1/traces")

    # The global tracer provider can only be set once per process.
    if not _provider_installed:
        provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
        if app.config.get("TESTING"):
            processor = SimpleSpanProcessor(InMemorySpanExporter())
        elif app.config.get("DEBUG"):
            processor = BatchSpanProcessor(ConsoleSpanExporter())
        else:
            processor = BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint))
        provider.add_span_processor(processor)
        trace.set_tracer_provider(provider)
        set_global_textmap(TraceContextTextMapPropagator())
        _provider_installed = True

    FlaskInstrumentor().instrument_app(app)
    with app.app_context():
        SQLAlchemyInstrumentor().instrument(engine=db.engine)
