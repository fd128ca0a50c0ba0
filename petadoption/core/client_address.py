"""Client Address Resolution — which IP an adoption is recorded against.

Invariants:
    - X-Forwarded-For is consulted only when the direct peer is a trusted proxy
    - The header is read right to left: each trusted proxy appends the address
      it received from, so the first untrusted entry from the right is the
      client; entries to its left are client-supplied and ignored
    - A chain made only of trusted proxies resolves to the peer
    - Never returns an empty string
"""

from collections.abc import Collection

UNKNOWN_CLIENT = "unknown"


def resolve_client_ip(
    peer: str | None,
    forwarded_for: str | None,
    trusted_proxies: Collection[str],
) -> str:
    """Return the caller's address from the socket peer and proxy header."""
    if not peer:
        return UNKNOWN_CLIENT
    if not forwarded_for or peer not in trusted_proxies:
        return peer
    hops = [hop.strip() for hop in forwarded_for.split(",")]
    for hop in reversed(hops):
        if not hop:
            continue
        if hop not in trusted_proxies:
            return hop
    return peer
