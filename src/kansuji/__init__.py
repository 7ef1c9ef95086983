"""
wafu-kansuji
"""
