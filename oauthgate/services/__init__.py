# -*- coding: utf-8 -*-
"""Location: ./oauthgate/services/__init__.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Services Package.
Exposes the ambient services used by the adapter:
- Logging
- Error reporting channel
"""
