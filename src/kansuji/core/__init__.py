"""
wafu-kansuji コアモジュール
"""
