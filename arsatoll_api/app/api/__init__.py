"""
API package containing versioned routes.

This package groups API versions under subpackages such as ``v1``,
together with the helpers every version shares: dependency providers
(``deps``) and alert headers (``headers``).
"""
