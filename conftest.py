"""
pytest configuration: set up Django before the test modules are collected.
"""

import os

import django

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'base.settings')
django.setup()
