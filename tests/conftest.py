import os

os.environ.setdefault("DD_TRACE_ENABLED", "false")
os.environ.setdefault("ELEVENLABS_API_KEY", "test-key")
os.environ.setdefault("RAG_BACKEND_URL", "http://rag.test")
