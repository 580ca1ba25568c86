"""
Identifier helpers
"""
import time
import uuid


def generate_id(prefix: str) -> str:
    """Opaque unique id: <prefix>_<epoch ms>_<random>"""
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"
