"""
Quick Test Script

Runs a minimal check that the client is installed and the API is
reachable, without changing any remote data.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))


def test_imports():
    """Test that all modules can be imported."""
    print("Testing imports...")

    from post_board.config import config
    print("  [OK] config")

    from post_board.api.client import APIClient
    print("  [OK] api.client")

    from post_board.forms.validator import validate_draft
    print("  [OK] forms.validator")

    from post_board.store.post_store import PostStore
    print("  [OK] store.post_store")

    from post_board.session.edit_session import EditSession
    print("  [OK] session.edit_session")

    from post_board.main import PostBoard
    print("  [OK] main")

    print("\nAll imports successful!")
    return True


def test_api():
    """Test API connection."""
    print("\nTesting API connection...")

    from post_board.api.client import APIClient

    client = APIClient()
    if client.test_connection():
        print("  [OK] API connection successful")
    else:
        print("  [WARN] API connection failed (may work anyway)")

    return True


def test_load():
    """Test loading and rendering the board."""
    print("\nTesting board load...")

    from post_board.main import PostBoard
    from post_board.view import render_board

    board = PostBoard()
    board.load()
    print(f"  [OK] Loaded {len(board.store.posts)} posts")
    print(render_board(board))

    return True


def main():
    """Run all quick tests."""
    print("=" * 50)
    print("Post Board - Quick Test")
    print("=" * 50)

    try:
        test_imports()
        test_api()
        test_load()

        print("\n" + "=" * 50)
        print("All tests passed! [OK]")
        print("=" * 50)

    except Exception as e:
        print(f"\n[FAIL] Test failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
