#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import os
import os.path
import subprocess


ci: bool = os.environ.get('CI', 'false').lower() == 'true'


# Rates table used when no tax year is explicitly requested
tax_year: str|None = os.environ.get('TAX_YEAR') or None


def get_version() -> str:
    try:
        version = subprocess.check_output([
            'git',
                '-C', os.path.dirname(__file__),
            'show',
                '-s',
                '--date=format:%Y-%m-%d',
                '--format=%h (%cd)',
                'HEAD',
        ], text=True, stderr=subprocess.DEVNULL)
    except (FileNotFoundError, subprocess.CalledProcessError):
        version = 'unknown'
    else:
        version = version.rstrip()
    return version
