"""Homework Chat - a streaming homework-assistant chat widget.

Combines NiceGUI for the browser widget, Agno for talking to the Hugging Face
inference endpoint, FastAPI for hosting, and Pydantic for configuration and
data validation.

Components:
    - agent: Session config, inference client and error classification
    - ui: Chat controller and the NiceGUI page that drives it
    - api: FastAPI application hosting the page
    - models: Message and streaming schemas
"""

__version__ = "0.1.0"
