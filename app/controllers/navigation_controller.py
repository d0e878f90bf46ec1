from app.app_state import app_state


class NavigationController:
    def __init__(self, stack_layout, routes=None):
        self.stack = stack_layout
        self.routes = routes or {}

    def push(self, widget, name):
        app_state.nav_stack.append(name)
        self.stack.addWidget(widget)
        self.stack.setCurrentWidget(widget)

    def navigate(self, name):
        """Push the panel registered for a route name."""
        factory = self.routes.get(name)
        if factory is None:
            raise KeyError(f"Unknown route: {name}")
        self.push(factory(self), name)

    def pop(self):
        if len(app_state.nav_stack) <= 1:
            return  # don't pop the profile screen

        current_widget = self.stack.currentWidget()
        self.stack.removeWidget(current_widget)
        current_widget.deleteLater()

        app_state.nav_stack.pop()
        self.stack.setCurrentIndex(self.stack.count() - 1)

        # notify the revealed panel
        current = self.stack.currentWidget()
        if hasattr(current, "refresh"):
            current.refresh()

    def current(self):
        return app_state.nav_stack[-1]
