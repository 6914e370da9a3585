# SPDX-FileCopyrightText: 2025 sshare contributors
# SPDX-License-Identifier: MIT
#
# conftest.py — test environment:
#   • src/ on sys.path so the package imports without installation
#   • SSHARE_* overrides cleared so tests see the default policy

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))

for _name in [key for key in os.environ if key.startswith("SSHARE_")]:
    del os.environ[_name]
