"""Flight Analytics – monthly volume, frequent flyers, hub-free runs and co-travel pairs.
Flight Analytics —— 月度航班量、常旅客、不经枢纽的最长行程与同行乘客对。
"""

__all__ = [
    "config",
    "io",
    "models",
    "validation",
    "analytics",
    "report",
    "viz",
]
