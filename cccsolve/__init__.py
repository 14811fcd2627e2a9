"""Solutions to programming contest problems, by contest and problem number."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "contest2010j",
    "contest2010s",
    "contest2014j",
    "contest2015j",
    "contest2016j",
    "contest2017j",
    "contest2018j",
    "contest2019",
    "contest2021j",
    "contest2022j",
    "contest2023j",
    "contest2024j",
]