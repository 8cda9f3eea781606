"""
Entry point for the standalone LeetCode proxy
Run: python run_proxy.py
"""
import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Add src to path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

if __name__ == "__main__":
    import uvicorn
    from loguru import logger

    port = int(os.getenv("PROXY_PORT", "4000"))
    logger.info(f"Proxy running on port {port}")
    uvicorn.run(
        "api.leetcode_proxy:app",
        host="0.0.0.0",
        port=port,
        reload=False,
        log_level="info"
    )
