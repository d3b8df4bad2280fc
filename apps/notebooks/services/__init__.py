"""Пакетный модуль для `apps/notebooks/services`."""
