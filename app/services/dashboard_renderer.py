"""Today dashboard page rendering (Jinja)."""

from datetime import tzinfo
from typing import List, Optional

from jinja2 import Environment

from app.models.task import Task
from app.utils.datetime_helper import format_due_time

# Context: tasks (list or None), load_error, mutation_error, complete_url (callable)
_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Today's Task Dashboard</title>
  <style>
    body { font-family: sans-serif; margin: 2rem; }
    table { border-collapse: collapse; width: 100%; }
    th, td { padding: 0.75rem 1.5rem; text-align: left; border-bottom: 1px solid #e5e7eb; }
    th { font-size: 0.75rem; text-transform: uppercase; color: #6b7280; background: #f9fafb; }
    .banner { padding: 0.75rem; margin-bottom: 1rem; border-radius: 4px; }
    .pending { background: #fef9c3; border: 1px solid #facc15; color: #854d0e; }
    .error { background: #fee2e2; border: 1px solid #f87171; color: #991b1b; }
    .badge { padding: 0 0.5rem; border-radius: 9999px; background: #fef9c3; color: #854d0e; font-size: 0.75rem; }
    button { padding: 0.5rem 1rem; background: #4f46e5; color: #fff; border: none; border-radius: 6px; }
    button:disabled { opacity: 0.5; }
    [hidden] { display: none; }
  </style>
</head>
<body>
{% if load_error is not none %}
  <div class="banner error">Error loading tasks: {{ load_error }}</div>
{% elif not tasks %}
  <div class="empty">🎉 No pending tasks due today!</div>
{% else %}
  <h1>🎯 Today's Task Dashboard</h1>
  <div id="updating" class="banner pending" hidden>Updating task status...</div>
  {% if mutation_error is not none %}
  <div class="banner error">Failed to complete task: {{ mutation_error }}</div>
  {% endif %}
  <table>
    <thead>
      <tr>
        <th>Task Title</th>
        <th>Related Application ID</th>
        <th>Due Date</th>
        <th>Status</th>
        <th></th>
      </tr>
    </thead>
    <tbody>
    {% for task in tasks %}
      <tr>
        <td>{{ task.display_title() }}</td>
        <td>{{ task.short_related_id() }}</td>
        <td>{{ due_time(task.due_at) }}</td>
        <td><span class="badge">{{ task.status.value }}</span></td>
        <td>
          <form method="post" action="{{ complete_url(task.id) }}" class="complete-form">
            <button type="submit">Mark Complete</button>
          </form>
        </td>
      </tr>
    {% endfor %}
    </tbody>
  </table>
  <script>
    document.querySelectorAll(".complete-form").forEach(function (form) {
      form.addEventListener("submit", function () {
        document.getElementById("updating").hidden = false;
        document.querySelectorAll(".complete-form button").forEach(function (b) { b.disabled = true; });
      });
    });
  </script>
{% endif %}
</body>
</html>
"""


class DashboardRenderer:
    """Renders the today dashboard from tasks and error state"""

    def __init__(self, base_path: str = "/dashboard/today", tz: Optional[tzinfo] = None) -> None:
        self.base_path = base_path.rstrip("/")
        self.tz = tz
        self._env = Environment(autoescape=True)
        self._template = self._env.from_string(_PAGE_TEMPLATE)

    def complete_url(self, task_id: str) -> str:
        return f"{self.base_path}/tasks/{task_id}/complete"

    def render(
        self,
        tasks: Optional[List[Task]] = None,
        load_error: Optional[str] = None,
        mutation_error: Optional[str] = None,
    ) -> str:
        """Render the page; load_error takes precedence over the task list."""
        return self._template.render(
            tasks=tasks or [],
            load_error=load_error,
            mutation_error=mutation_error,
            complete_url=self.complete_url,
            due_time=lambda dt: format_due_time(dt, self.tz),
        )
