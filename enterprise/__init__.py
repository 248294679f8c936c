"""
Enterprise license validation for Django projects.

Add ``'enterprise'`` to INSTALLED_APPS; the license is loaded once when the
app registry is ready.
"""
