"""Single-page task client served at /.

Form + list UI over the task API. Keeps a local copy of the list, filters
it in the browser, and re-fetches whenever the /ws channel delivers a tag.
"""

import html
import json


def render_root_page(app_name: str, api_prefix: str = "") -> str:
    """Return HTML for the task management page."""
    title = html.escape(app_name)
    prefix = json.dumps(api_prefix)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        * {{ box-sizing: border-box; }}
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            background: linear-gradient(90deg, #6366f1, #a855f7, #ec4899);
            display: flex;
            align-items: center;
            justify-content: center;
            padding: 2rem 1rem;
        }}
        .card {{
            background: #fff;
            padding: 2rem;
            border-radius: 8px;
            width: 100%;
            max-width: 800px;
            box-shadow: 0 10px 25px rgba(0, 0, 0, 0.2);
        }}
        h1 {{ text-align: center; color: #1f2937; margin-top: 0; }}
        h1 span {{ color: #6b7280; }}
        select, input, button {{ font-size: 1rem; }}
        select, input {{
            width: 100%;
            padding: 0.75rem;
            border: 2px solid #d1d5db;
            border-radius: 6px;
            margin-bottom: 1rem;
        }}
        button {{
            padding: 0.6rem 1rem;
            border: 0;
            border-radius: 6px;
            color: #fff;
            cursor: pointer;
        }}
        .primary {{ width: 100%; background: #4f46e5; }}
        .complete {{ background: #22c55e; }}
        .danger {{ background: #ef4444; }}
        .task {{
            display: flex;
            justify-content: space-between;
            align-items: center;
            padding: 1rem;
            margin-top: 1rem;
            background: #f9fafb;
            border: 2px solid #e5e7eb;
            border-radius: 6px;
        }}
        .task .name.completed {{ text-decoration: line-through; color: #6b7280; }}
        .task .status {{ font-size: 0.85rem; font-weight: 600; color: #eab308; }}
        .task .status.completed {{ color: #22c55e; }}
        .task .actions button {{ margin-left: 0.5rem; }}
        .empty {{ text-align: center; color: #6b7280; margin-top: 2rem; }}
        #toasts {{ position: fixed; right: 1rem; bottom: 1rem; }}
        .toast {{
            color: #fff;
            padding: 0.75rem 1rem;
            border-radius: 6px;
            margin-top: 0.5rem;
        }}
        .toast.success {{ background: #16a34a; }}
        .toast.error {{ background: #dc2626; }}
    </style>
</head>
<body>
    <div class="card">
        <h1>Task <span>Management</span></h1>

        <select id="filter" aria-label="Filter">
            <option value="all">All Tasks</option>
            <option value="pending">Pending</option>
            <option value="completed">Completed</option>
        </select>

        <form id="add-form">
            <input id="task-name" type="text" placeholder="Enter Task Name" required>
            <select id="task-status" aria-label="Status">
                <option value="pending">Pending</option>
                <option value="completed">Completed</option>
            </select>
            <button type="submit" class="primary">Add Task</button>
        </form>

        <div id="task-list"></div>
    </div>
    <div id="toasts" aria-live="polite"></div>
    <script>
        (function () {{
            var base = window.location.origin + {prefix};
            var tasks = [];
            var filter = "all";

            function toast(kind, text) {{
                var el = document.createElement("div");
                el.className = "toast " + kind;
                el.textContent = text;
                document.getElementById("toasts").appendChild(el);
                setTimeout(function () {{ el.remove(); }}, 5000);
            }}

            function visible() {{
                if (filter === "all") return tasks;
                return tasks.filter(function (t) {{
                    return t.status.toLowerCase() === filter.toLowerCase();
                }});
            }}

            function render() {{
                var list = document.getElementById("task-list");
                list.innerHTML = "";
                var shown = visible();
                if (shown.length === 0) {{
                    var p = document.createElement("p");
                    p.className = "empty";
                    p.textContent = "No tasks available";
                    list.appendChild(p);
                    return;
                }}
                shown.forEach(function (t) {{
                    var row = document.createElement("div");
                    row.className = "task";
                    var info = document.createElement("div");
                    var name = document.createElement("div");
                    name.className = "name " + t.status;
                    name.textContent = t.name;
                    var status = document.createElement("div");
                    status.className = "status " + t.status;
                    status.textContent = t.status.charAt(0).toUpperCase() + t.status.slice(1);
                    info.appendChild(name);
                    info.appendChild(status);
                    var actions = document.createElement("div");
                    actions.className = "actions";
                    var done = document.createElement("button");
                    done.className = "complete";
                    done.textContent = "Mark Completed";
                    done.onclick = function () {{ markCompleted(t.id); }};
                    var del = document.createElement("button");
                    del.className = "danger";
                    del.textContent = "Delete";
                    del.onclick = function () {{ remove(t.id); }};
                    actions.appendChild(done);
                    actions.appendChild(del);
                    row.appendChild(info);
                    row.appendChild(actions);
                    list.appendChild(row);
                }});
            }}

            async function fetchTasks() {{
                try {{
                    var resp = await fetch(base + "/tasks");
                    if (!resp.ok) throw new Error("HTTP " + resp.status);
                    tasks = await resp.json();
                    render();
                }} catch (err) {{
                    console.error("Error fetching tasks:", err);
                }}
            }}

            async function send(method, path, body, okText, errText) {{
                try {{
                    var init = {{ method: method, headers: {{}} }};
                    if (body !== undefined) {{
                        init.headers["Content-Type"] = "application/json";
                        init.body = JSON.stringify(body);
                    }}
                    var resp = await fetch(base + path, init);
                    if (!resp.ok) throw new Error("HTTP " + resp.status);
                    toast("success", okText);
                    return true;
                }} catch (err) {{
                    console.error(errText, err);
                    toast("error", errText);
                    return false;
                }}
            }}

            function markCompleted(id) {{
                send("PUT", "/tasks/" + id, {{ status: "completed" }},
                     "Task status updated!", "Error updating task status!");
            }}

            function remove(id) {{
                send("DELETE", "/tasks/" + id, undefined,
                     "Task deleted successfully!", "Error deleting task!");
            }}

            document.getElementById("filter").addEventListener("change", function (e) {{
                filter = e.target.value;
                render();
            }});

            document.getElementById("add-form").addEventListener("submit", async function (e) {{
                e.preventDefault();
                var nameInput = document.getElementById("task-name");
                if (!nameInput.value) return;
                var ok = await send("POST", "/tasks",
                    {{ name: nameInput.value, status: document.getElementById("task-status").value }},
                    "Task added successfully!", "Error adding task!");
                if (ok) nameInput.value = "";
            }});

            var wsUrl = base.replace(/^http/, "ws") + "/ws";
            var socket = new WebSocket(wsUrl);
            socket.onmessage = function (msg) {{
                if (msg.data === "taskAdded" || msg.data === "taskUpdated" || msg.data === "taskDeleted") {{
                    fetchTasks();
                }}
            }};

            fetchTasks();
        }})();
    </script>
</body>
</html>
""".strip()
