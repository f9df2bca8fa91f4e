"""测试用 Mock"""
