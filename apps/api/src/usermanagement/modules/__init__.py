"""
Feature modules - roles, users and shared model base.
"""
