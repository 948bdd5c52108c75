"""Shared constants for resume-ai-gateway."""

from __future__ import annotations

# Prompt versions: increment when prompt templates change
SUMMARY_ENHANCER_PROMPT_VERSION = "v1"
JOB_DESC_ENHANCER_PROMPT_VERSION = "v1"
RESUME_EXTRACTOR_PROMPT_VERSION = "v1"
RESUME_ANALYZER_PROMPT_VERSION = "v1"

# Payment gateway
DEFAULT_CURRENCY = "INR"
RECEIPT_PREFIX = "receipt_resume_"
SIGNATURE_SEPARATOR = "|"

# Caller-facing messages
PAYMENT_SUCCESS_MESSAGE = "Payment successful! Resume analysis has been unlocked."
MISSING_ORDER_FIELDS_MESSAGE = "Resume ID and amount are required"
MISSING_PAYMENT_FIELDS_MESSAGE = "Missing required payment details"
MISSING_RESUME_ID_MESSAGE = "Resume ID is required"

# Analysis score bounds
MIN_ANALYSIS_SCORE = 0
MAX_ANALYSIS_SCORE = 100
