from __future__ import annotations

from contextvars import ContextVar, Token
from typing import Optional

# Request id of the HTTP request being served; empty outside a request (e.g. CLI runs).
_request_id_var: ContextVar[str] = ContextVar("solutions_request_id", default="")

def set_request_id(rid: str) -> Token:
    return _request_id_var.set(rid or "")

def get_request_id() -> str:
    return _request_id_var.get() or ""

def clear_request_id(token: Optional[Token] = None) -> None:
    if token is not None:
        _request_id_var.reset(token)
    else:
        _request_id_var.set("")
