"""UI components"""
