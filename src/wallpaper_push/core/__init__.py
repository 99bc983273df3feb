from wallpaper_push.core.scheduler import DispatchScheduler

__all__ = ["DispatchScheduler"]
