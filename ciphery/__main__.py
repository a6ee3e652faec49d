#!/usr/bin/env python3
import sys
from ciphery.cli import main


sys.exit(main())
