from phnews.proxy.service import DEFAULT_WINDOWS_DAYS, NewsProxy

__all__ = ["DEFAULT_WINDOWS_DAYS", "NewsProxy"]
