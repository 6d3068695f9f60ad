"""Vitals Engine HTTP API."""
