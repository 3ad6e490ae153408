"""
tilt-space：傾斜控制的 2D 街機模擬
"""

__version__ = "0.1.0"
