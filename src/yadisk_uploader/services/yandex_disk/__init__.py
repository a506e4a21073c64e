"""Yandex Disk REST API upload client."""
