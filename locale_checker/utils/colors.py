"""ANSI color codes for terminal output."""


class Colors:
    """ANSI color codes for terminal output."""

    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    @classmethod
    def paint(cls, text: str, color: str, enabled: bool = True) -> str:
        """Wrap text in a color code, or return it unchanged when disabled."""
        if not enabled:
            return text
        return f"{color}{text}{cls.ENDC}"

    @classmethod
    def success(cls, text: str, enabled: bool = True) -> str:
        """Return text in green color."""
        return cls.paint(text, cls.OKGREEN, enabled)

    @classmethod
    def error(cls, text: str, enabled: bool = True) -> str:
        """Return text in red color."""
        return cls.paint(text, cls.FAIL, enabled)

    @classmethod
    def warning(cls, text: str, enabled: bool = True) -> str:
        """Return text in yellow color."""
        return cls.paint(text, cls.WARNING, enabled)

    @classmethod
    def info(cls, text: str, enabled: bool = True) -> str:
        """Return text in cyan color."""
        return cls.paint(text, cls.OKCYAN, enabled)

    @classmethod
    def bold(cls, text: str, enabled: bool = True) -> str:
        """Return text in bold."""
        return cls.paint(text, cls.BOLD, enabled)
