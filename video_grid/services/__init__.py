"""Video Grid services"""
