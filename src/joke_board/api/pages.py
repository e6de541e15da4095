"""Server-rendered HTML pages."""

from html import escape

from joke_board.domain.models import JokeRecord, UserRecord
from joke_board.domain.submissions import ActionData
from joke_board.services.validation import (
    MIN_JOKE_CONTENT_LENGTH,
    MIN_JOKE_NAME_LENGTH,
)

_STYLE = """
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      header { display: flex; justify-content: space-between; margin-bottom: 1rem; }
      .row { margin-bottom: 1rem; }
      input, textarea { padding: 0.4rem 0.6rem; width: 320px; }
      textarea { height: 6rem; }
      button { padding: 0.4rem 0.8rem; }
      .form-validation-error { color: #b00020; margin: 0.25rem 0; }
      .error-container { padding: 1rem; background: #fde7e9; }
      .joke-preview { opacity: 0.6; }
"""


def render_layout(title: str, body: str, user: UserRecord | None = None) -> str:
    """Wrap page content in the shared document shell."""
    if user is None:
        account = '<a href="/login">Login</a>'
    else:
        account = (
            f"<span>Hi {escape(user.username)}</span> "
            '<form action="/logout" method="post" style="display:inline">'
            '<button type="submit">Logout</button></form>'
        )
    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{escape(title)} | Joke Board</title>
    <style>{_STYLE}</style>
  </head>
  <body>
    <header><a href="/">Joke Board</a><div>{account}</div></header>
    <main>
{body}
    </main>
  </body>
</html>
"""


def render_index(user: UserRecord | None, jokes: list[JokeRecord]) -> str:
    body = ["<h1>Joke Board</h1>", '<p><a href="/jokes/new">Add your own</a></p>']
    body.append(_joke_links(jokes))
    return render_layout("Home", "\n".join(body), user)


def render_joke_list(user: UserRecord | None, jokes: list[JokeRecord]) -> str:
    body = f"<h1>Jokes</h1>\n{_joke_links(jokes)}"
    return render_layout("Jokes", body, user)


def render_joke(user: UserRecord | None, joke: JokeRecord) -> str:
    body = (
        "<p>Here's your hilarious joke:</p>"
        f"<h2>{escape(joke.name)}</h2>"
        f"<p>{escape(joke.content)}</p>"
        '<p><a href="/jokes">Back to jokes</a></p>'
    )
    return render_layout(joke.name, body, user)


def render_new_joke(user: UserRecord | None, data: ActionData | None = None) -> str:
    """Render the new-joke form, annotated with errors from a rejected submit.

    The embedded script validates with the same length limits and shows the
    prospective joke while the submission is in flight.
    """
    fields = (data.fields if data and data.fields else {}) or {}
    field_errors = data.field_errors if data else None
    name_error = getattr(field_errors, "name", None)
    content_error = getattr(field_errors, "content", None)
    form_error = data.form_error if data else None
    name_value = escape(fields.get("name", ""))
    content_value = escape(fields.get("content", ""))
    body = f"""<p>Add your own hilarious joke</p>
<div id="joke-preview" class="joke-preview" hidden>
  <h2 data-preview="name"></h2>
  <p data-preview="content"></p>
</div>
<form id="new-joke-form" method="post" action="/jokes/new"
      data-min-name="{MIN_JOKE_NAME_LENGTH}"
      data-min-content="{MIN_JOKE_CONTENT_LENGTH}">
  <div class="row">
    <label>Name:
      <input type="text" name="name" value="{name_value}"
             {_invalid_attrs('name', name_error)} />
    </label>
    {_error_paragraph('name-error', name_error)}
  </div>
  <div class="row">
    <label>Content:
      <textarea name="content"
                {_invalid_attrs('content', content_error)}>{content_value}</textarea>
    </label>
    {_error_paragraph('content-error', content_error)}
  </div>
  {_error_paragraph('form-error', form_error)}
  <div class="row"><button type="submit">Add</button></div>
</form>
<script>{_OPTIMISTIC_SUBMIT_SCRIPT}</script>"""
    return render_layout("New joke", body, user)


def render_login(data: ActionData | None = None, redirect_to: str = "") -> str:
    fields = (data.fields if data and data.fields else {}) or {}
    field_errors = data.field_errors if data else None
    username_error = getattr(field_errors, "username", None)
    password_error = getattr(field_errors, "password", None)
    form_error = data.form_error if data else None
    redirect_value = fields.get("redirectTo", redirect_to)
    body = f"""<h1>Login</h1>
<form method="post" action="/login">
  <input type="hidden" name="redirectTo" value="{escape(redirect_value)}" />
  <div class="row">
    <label>Username:
      <input type="text" name="username" value="{escape(fields.get('username', ''))}"
             {_invalid_attrs('username', username_error)} />
    </label>
    {_error_paragraph('username-error', username_error)}
  </div>
  <div class="row">
    <label>Password:
      <input type="password" name="password"
             {_invalid_attrs('password', password_error)} />
    </label>
    {_error_paragraph('password-error', password_error)}
  </div>
  {_error_paragraph('form-error', form_error)}
  <div class="row"><button type="submit">Login</button></div>
</form>"""
    return render_layout("Login", body)


def render_not_found(user: UserRecord | None = None) -> str:
    body = '<div class="error-container">What you\'re looking for doesn\'t exist.</div>'
    return render_layout("Not found", body, user)


def render_error() -> str:
    body = (
        '<div class="error-container">'
        "Something unexpected went wrong. Sorry about that."
        "</div>"
    )
    return render_layout("Error", body)


def _joke_links(jokes: list[JokeRecord]) -> str:
    if not jokes:
        return "<p>No jokes yet.</p>"
    items = "".join(
        f'<li><a href="/jokes/{joke.id}">{escape(joke.name)}</a></li>' for joke in jokes
    )
    return f"<ul>{items}</ul>"


def _invalid_attrs(field: str, error: str | None) -> str:
    if not error:
        return 'aria-invalid="false"'
    return f'aria-invalid="true" aria-describedby="{field}-error"'


def _error_paragraph(element_id: str, error: str | None) -> str:
    hidden = "" if error else " hidden"
    return (
        f'<p class="form-validation-error" role="alert" id="{element_id}"{hidden}>'
        f"{escape(error or '')}</p>"
    )


_OPTIMISTIC_SUBMIT_SCRIPT = """
(function () {
  const form = document.getElementById('new-joke-form');
  const preview = document.getElementById('joke-preview');
  const minName = Number(form.dataset.minName);
  const minContent = Number(form.dataset.minContent);

  function showErrors(payload) {
    const fieldErrors = payload.fieldErrors || {};
    for (const field of ['name', 'content']) {
      const message = fieldErrors[field];
      const input = form.elements[field];
      const error = document.getElementById(field + '-error');
      input.setAttribute('aria-invalid', message ? 'true' : 'false');
      error.textContent = message || '';
      error.hidden = !message;
      if (payload.fields && field in payload.fields) {
        input.value = payload.fields[field];
      }
    }
    const formError = document.getElementById('form-error');
    formError.textContent = payload.formError || '';
    formError.hidden = !payload.formError;
  }

  form.addEventListener('submit', async function (event) {
    event.preventDefault();
    const data = new FormData(form);
    const name = String(data.get('name') || '');
    const content = String(data.get('content') || '');
    // Count code points like the server does.
    if (Array.from(name).length >= minName
        && Array.from(content).length >= minContent) {
      preview.querySelector('[data-preview="name"]').textContent = name;
      preview.querySelector('[data-preview="content"]').textContent = content;
      preview.hidden = false;
      form.hidden = true;
    }
    let response;
    try {
      response = await fetch(form.action, {
        method: 'POST',
        body: new URLSearchParams(data),
        headers: { Accept: 'application/json' },
      });
    } catch (error) {
      form.submit();
      return;
    }
    if (response.redirected) {
      window.location.assign(response.url);
      return;
    }
    if (response.status !== 400) {
      document.open();
      document.write(await response.text());
      document.close();
      return;
    }
    const payload = await response.json().catch(function () { return {}; });
    preview.hidden = true;
    form.hidden = false;
    showErrors(payload);
  });
})();
"""
