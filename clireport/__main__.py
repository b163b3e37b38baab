"""clireport: Launcher.

Released under the Apache Software Licence, v2.0.
"""

import re
import sys

from clireport import main


sys.argv[0] = re.sub(r"__main__.py$", "clireport", sys.argv[0])
main()
