# smartres_api/common/paging.py
from flask import request

DEFAULT_PAGE = 1
DEFAULT_SIZE = 20
MAX_SIZE = 100

def page_size():
    """
    Returns (page, size) or (None, None) when the caller did not ask for paging.
    ?page=2&size=50  (size clamped to [1, MAX_SIZE])
    """
    if "page" not in request.args:
        return None, None
    try:
        page = max(int(request.args.get("page", DEFAULT_PAGE)), 1)
    except Exception:
        page = DEFAULT_PAGE
    try:
        size = int(request.args.get("size", DEFAULT_SIZE))
        size = max(1, min(size, MAX_SIZE))
    except Exception:
        size = DEFAULT_SIZE
    return page, size

def bool_arg(name: str):
    """Parse ?name=true/false; None when absent, ValueError when malformed."""
    if name not in request.args:
        return None
    v = (request.args.get(name) or "").lower()
    if v in ("true", "1", "yes"):
        return True
    if v in ("false", "0", "no"):
        return False
    raise ValueError(f"{name} must be true/false")

def paged(query, row_fn):
    """
    Run `query` and shape rows with `row_fn`.
    Returns (rows, meta) where meta is empty when no paging was requested.
    """
    page, size = page_size()
    if page is None:
        return [row_fn(x) for x in query.all()], {}
    total = query.count()
    items = query.offset((page - 1) * size).limit(size).all()
    return [row_fn(x) for x in items], {"page": page, "size": size, "total": total}
