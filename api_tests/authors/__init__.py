"""Authors resource scenarios"""
