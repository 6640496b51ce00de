#!/usr/bin/env python3
"""
Signup Demo - Main Entry Point

Runs the Flask web application with the signup and login forms.

Usage:
    python main.py
"""

import argparse
import logging

def main():
    parser = argparse.ArgumentParser(description="Signup / Login Demo")

    # Web app specific arguments
    parser.add_argument("--host", default="0.0.0.0", help="Web app host")
    parser.add_argument("--port", type=int, default=5000, help="Web app port")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    from webapp.app import create_app
    app = create_app()
    print(f"🚀 Starting Signup Demo Web App...")
    print(f"📍 Server running at: http://{args.host}:{args.port}")
    print(f"🔧 Debug mode: {'ON' if args.debug else 'OFF'}")
    app.run(host=args.host, port=args.port, debug=args.debug)

if __name__ == "__main__":
    main()
