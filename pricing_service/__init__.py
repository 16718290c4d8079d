"""Promotion-aware pricing service"""
