"""
RefineryEye inspection backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain models, infrastructure (blob storage, report stores, Gemini client,
PDF rendering) and the async client that drives the inspection workflow.
"""

__version__ = "1.0.0"
