from .log import AuditLog, AuditSink

__all__ = ["AuditLog", "AuditSink"]
