"""Books resource scenarios"""
