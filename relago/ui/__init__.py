from .time_ago import TimeAgoLabel

__all__ = ["TimeAgoLabel"]
