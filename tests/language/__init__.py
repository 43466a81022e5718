"""Tests for graphql_walker.language"""
