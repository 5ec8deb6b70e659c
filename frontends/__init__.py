"""
OOD Principles Frontends
Renderers for different display modes.

DUCK TYPING EXAMPLE:
Both renderers have the same interface:
- render_demo(principle, result)
- handle_input() -> dict
- cleanup()

No shared base class needed! Just swap them:

    # Plain text pages
    renderer = ConsoleRenderer()

    # Or a window
    renderer = PygameRenderer(1024, 768)

    # The page loop works with either:
    for result in session.run():
        renderer.render_demo(get_principle(result.principle), result)
"""

# Note: Don't import renderers here to avoid importing pygame
# when it might not be needed. Import directly in main.py instead.
