"""Read-only dashboard for the clinic schedule.

This module exposes a small Flask application that shows appointment
statistics and the day's schedule. Data is loaded from the appointment data
file on every request. A missing file is tolerated so the dashboard can run
before the front desk has saved anything.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, MutableMapping

from flask import Flask, Response, jsonify, render_template_string, request

from records import AppointmentStore
from records.csv_file import DEFAULT_DATA_FILE, load_store
from scheduling.appointments import appointments_on, list_appointments
from scheduling.reporting import compute_stats


class ScheduleRepository:
    """Repository responsible for loading the schedule from disk."""

    def __init__(self, data_file: Path | None = None) -> None:
        self._data_file = Path(data_file) if data_file is not None else DEFAULT_DATA_FILE

    @property
    def data_file(self) -> Path:
        return self._data_file

    def load(self) -> AppointmentStore:
        return load_store(self._data_file)


def build_dashboard_context(
    repo: ScheduleRepository,
    target_date: str | None,
) -> MutableMapping[str, object]:
    store = repo.load()
    if target_date:
        appointments = appointments_on(store, target_date)
    else:
        appointments = list_appointments(store)

    return {
        "filters": {"date": target_date or ""},
        "stats": compute_stats(store).to_dict(),
        "appointments": [record.to_dict() for record in appointments],
    }


app = Flask(__name__)
repository = ScheduleRepository()

dashboard_template = """
<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\">
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\">
    <meta http-equiv=\"refresh\" content=\"60\">
    <title>Clinic Schedule</title>
    <link
      href=\"https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css\"
      rel=\"stylesheet\"
      integrity=\"sha384-QWTKZyjpPEjISv5WaRU9OFeRpok6YctnYmDr5pNlyT2bRjXh0JMhjY6hW+ALEwIH\"
      crossorigin=\"anonymous\"
    >
  </head>
  <body class=\"bg-light\">
    <nav class=\"navbar navbar-expand-lg navbar-dark bg-primary\">
      <div class=\"container-fluid\">
        <a class=\"navbar-brand\" href=\"#\">Clinic Schedule</a>
      </div>
    </nav>
    <main class=\"container my-4\">
      <section class=\"mb-4\">
        <form class=\"row gy-2 gx-3 align-items-center\" method=\"get\" action=\"/dashboard\" aria-label=\"Schedule filters\">
          <div class=\"col-md-3\">
            <label for=\"filter-date\" class=\"form-label\">Date</label>
            <input
              id=\"filter-date\"
              name=\"date\"
              type=\"date\"
              class=\"form-control\"
              value=\"{{ filters.date }}\"
            >
          </div>
          <div class=\"col-md-3 align-self-end\">
            <button type=\"submit\" class=\"btn btn-primary w-100\">Apply Filters</button>
          </div>
        </form>
      </section>
      <section class=\"row g-4 mb-4\">
        <div class=\"col-md-4\">
          <div class=\"card shadow-sm\"><div class=\"card-body\">
            <h6 class=\"text-muted\">Total Records</h6>
            <p class=\"fs-3 mb-0\" id=\"stat-total\">{{ stats.total }}</p>
          </div></div>
        </div>
        <div class=\"col-md-4\">
          <div class=\"card shadow-sm\"><div class=\"card-body\">
            <h6 class=\"text-muted\">Active Appointments</h6>
            <p class=\"fs-3 mb-0\" id=\"stat-active\">{{ stats.active }}</p>
          </div></div>
        </div>
        <div class=\"col-md-4\">
          <div class=\"card shadow-sm\"><div class=\"card-body\">
            <h6 class=\"text-muted\">Inactive/Cancelled</h6>
            <p class=\"fs-3 mb-0\" id=\"stat-inactive\">{{ stats.inactive }}</p>
          </div></div>
        </div>
      </section>
      <section>
        <div class=\"card shadow-sm\">
          <div class=\"card-header bg-success text-white\">Appointments</div>
          <div class=\"card-body\">
            {% if appointments %}
              <div class=\"table-responsive\">
                <table class=\"table table-sm table-striped\">
                  <thead>
                    <tr>
                      <th scope=\"col\">ID</th>
                      <th scope=\"col\">Patient</th>
                      <th scope=\"col\">Doctor</th>
                      <th scope=\"col\">Date</th>
                      <th scope=\"col\">Time</th>
                      <th scope=\"col\">Status</th>
                    </tr>
                  </thead>
                  <tbody>
                    {% for appointment in appointments %}
                      <tr>
                        <td>{{ appointment.appointment_id }}</td>
                        <td>{{ appointment.patient_name }}</td>
                        <td>{{ appointment.doctor_name }}</td>
                        <td>{{ appointment.date }}</td>
                        <td>{{ appointment.time }}</td>
                        <td>{{ appointment.status }}</td>
                      </tr>
                    {% endfor %}
                  </tbody>
                </table>
              </div>
            {% else %}
              <p class=\"text-muted mb-0\">No appointments found for the selected filters.</p>
            {% endif %}
          </div>
        </div>
      </section>
    </main>
  </body>
</html>
"""


@app.route("/appointments", methods=["GET"])
def appointments() -> Response:
    """Return every appointment in chronological order as JSON."""
    records: List[MutableMapping[str, object]] = [
        record.to_dict() for record in list_appointments(repository.load())
    ]
    return jsonify(records)


@app.route("/stats", methods=["GET"])
def stats() -> Response:
    return jsonify(compute_stats(repository.load()).to_dict())


@app.route("/dashboard", methods=["GET"])
def dashboard() -> str:
    target_date = request.args.get("date") or None
    context = build_dashboard_context(repository, target_date)
    return render_template_string(dashboard_template, **context)


if __name__ == "__main__":
    app.run(
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "5000")),
        debug=False,
    )
