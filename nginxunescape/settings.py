import os

import dotenv

from nginxunescape.models import ErrorPolicy

dotenv.load_dotenv(".env")

STRICT = bool(int(os.getenv("NGINX_UNESCAPE_STRICT", 0)))
ON_ERROR = ErrorPolicy(os.getenv("NGINX_UNESCAPE_ON_ERROR", ErrorPolicy.skip.value))
LOG_LEVEL = os.getenv("NGINX_UNESCAPE_LOG_LEVEL", "WARNING").upper()
BENCH_ITERATIONS = int(os.getenv("NGINX_UNESCAPE_BENCH_ITERATIONS", 100_000))
