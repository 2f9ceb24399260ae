"""Model candidate lists and generation settings."""

from typing import Dict, Any, List

# Ordered newest/most capable first; the first candidate that answers a probe wins.
TEXT_MODEL_CANDIDATES: List[str] = [
    "gemini-2.0-flash-exp",
    "gemini-1.5-flash-latest",
    "gemini-1.5-flash",
    "gemini-1.5-pro-latest",
    "gemini-1.5-pro",
]

IMAGE_MODEL_CANDIDATES: List[str] = [
    "gemini-2.5-flash-preview-05-20",
    "gemini-2.0-flash-exp",
    "gemini-1.5-flash-latest",
    "gemini-1.5-flash",
]

MODEL_CONFIG: Dict[str, Dict[str, Any]] = {
    "text": {
        "candidates": TEXT_MODEL_CANDIDATES,
        "generation": {
            "temperature": 0.7,
            "top_k": 40,
            "top_p": 0.95,
            "max_output_tokens": 8192,
        },
    },
    "image": {
        "candidates": IMAGE_MODEL_CANDIDATES,
        "generation": {
            "temperature": 0.4,
            "top_k": 32,
            "top_p": 0.95,
            "max_output_tokens": None,
        },
    },
}

PROBE_PROMPT = "Test"
