"""Geo-fenced attendance package.

This package is organized by feature modules (geofence, evidence, attendance, ...)
with a thin Flask controller layer and service/repository layers underneath.
"""
