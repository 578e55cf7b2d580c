# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the objschema documentation."""

project = "objschema"
author = "ObjSchema Contributors"
release = "0.1.0"

extensions: list[str] = []

html_theme = "alabaster"
