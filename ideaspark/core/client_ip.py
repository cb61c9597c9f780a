"""
Client address resolution for per-IP usage tracking.
"""
from fastapi import Request


def get_client_ip(request: Request, trust_forwarded_for: bool = False) -> str:
    """
    Extract client IP address from request.

    X-Forwarded-For is only honoured when the app runs behind a proxy that
    sets it; otherwise any client could pick its own quota bucket.
    """
    if trust_forwarded_for:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            # Take the first IP in the chain
            first_hop = forwarded.split(",")[0].strip()
            if first_hop:
                return first_hop[:45]

    # Fallback to direct client IP
    if request.client and request.client.host:
        return request.client.host

    return "unknown"
