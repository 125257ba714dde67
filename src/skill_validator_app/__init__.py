"""Skill Validator HTTP 應用程序。"""
