"""File I/O helpers"""
