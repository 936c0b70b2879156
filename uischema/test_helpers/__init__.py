"""Helpers for testing code built on uischema"""
