"""Layout services: drag snapping and linked shaft movement"""
