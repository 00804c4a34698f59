"""Personal development environment bootstrap.

Core design goals:
- One linear pipeline of steps
- Every step shells out to the real tool (git, curl, apt-get, chsh)
- Clone when missing, pull when present
- Centralized logging
"""

__all__ = []
