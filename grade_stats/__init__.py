"""Grade statistics service over a MongoDB grades collection"""
