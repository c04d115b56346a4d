from profile_auth.sdk.controller import SessionController, SessionListener

__all__ = ["SessionController", "SessionListener"]
