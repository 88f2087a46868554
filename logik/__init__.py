"""
Logik: a five-pin, eight-color code breaking game.
"""
