"""
Test suite for combin-gen

Contains:
- tests/unit/          : Unit tests for generator, classifier, pipeline and harness
"""
