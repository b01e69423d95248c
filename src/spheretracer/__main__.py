import sys

from spheretracer.main import main

sys.exit(main())
