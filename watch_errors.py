# watch_errors.py


class WatchError(Exception):
    """Base for every error the watcher reports before exiting."""


class ConfigError(WatchError):
    pass


class UpstreamError(WatchError):
    pass


class MalformedRecord(WatchError):
    """
    A stats log line that could not be parsed.
    line_no is 1-based and counts the header line.
    """

    def __init__(self, line_no, reason):
        super().__init__(f"line {line_no}: {reason}")
        self.line_no = line_no
        self.reason = reason
