"""Retrieval and answering services."""

from codeqa.services.qa_service import QAService, build_context, confidence_for

__all__ = ["QAService", "build_context", "confidence_for"]
