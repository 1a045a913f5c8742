"""Core models, configuration, errors and the generation pipeline"""
