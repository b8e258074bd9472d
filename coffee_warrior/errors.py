class AssetUnavailable(Exception):
    """Raised when a required visual asset is missing or unreadable."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"required asset unavailable: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
