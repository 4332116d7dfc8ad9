"""CLI 서브커맨드"""
