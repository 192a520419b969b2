"""envref command line interface"""
