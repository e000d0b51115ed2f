# lexirank/logging/tags.py
"""
Subsystem tags prefixed to log messages.

Keeps log output greppable by subsystem. Changing a tag here updates it
project-wide.
"""

INDEX = "[INDEX]"
RETRIEVER = "[RETRIEVER]"
INGEST = "[INGEST]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
