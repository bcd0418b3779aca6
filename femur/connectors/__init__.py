from .telemetry_client import TelemetryClient

__all__ = ["TelemetryClient"]
