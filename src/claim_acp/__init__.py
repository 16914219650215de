"""claim-acp: OIDC claim release and remote access decisions.

Two independent entry points are called by the surrounding authentication
pipeline:

- release/: ReleaseEngine decides which resolved attributes are released
  as claims under scope-based release rules.
- access/: RemoteAccessEvaluator asks a remote endpoint whether a principal
  may access a registered service.

Both are stateless per request. Configuration is immutable once loaded.
"""

__version__ = "0.1.0"
