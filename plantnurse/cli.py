"""Plant Nurse CLI — main entry point for `plantnurse`."""


def main():
    """Start the Plant Nurse API server."""
    import uvicorn
    from plantnurse.core.config import get_settings

    settings = get_settings()

    print("🪴 Plant Nurse — houseplant check-in tracker")
    print(f"   Starting on http://{settings.host}:{settings.port}")
    print(f"   API Docs:  http://{settings.host}:{settings.port}/docs")
    print("")

    uvicorn.run(
        "plantnurse.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
