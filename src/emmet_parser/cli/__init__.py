"""Command line interface for emmet_parser"""
