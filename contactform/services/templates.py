"""
Plain-text and HTML renderings of a contact submission.
"""

from html import escape

from contactform.models.contact import Submission

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>New Contact Form Submission</title>
  <style>
    body {{ font-family: 'Raleway', Arial, sans-serif; line-height: 1.6; color: #28293D; max-width: 650px; margin: 0 auto; background-color: #f9f9f9; }}
    .container {{ border-radius: 12px; overflow: hidden; box-shadow: 0px 8px 16px rgba(0, 0, 0, 0.08); margin: 20px auto; }}
    .header {{ background-color: #6BA0A7; padding: 25px; text-align: center; }}
    .header h2 {{ color: white; margin: 0; font-weight: 800; font-size: 24px; }}
    .site-title {{ color: white; font-size: 32px; font-weight: 800; letter-spacing: 1px; margin: 0 0 5px 0; }}
    .content {{ background-color: white; padding: 30px; }}
    .accent-box {{ border-top: 3px solid #D99F9B; background-color: #FFF3F4; padding: 15px; margin: 0 0 25px; border-radius: 8px; font-weight: 600; }}
    .field {{ margin-bottom: 20px; border-left: 4px solid #DAAA52; padding-left: 15px; }}
    .label {{ font-weight: 700; margin-bottom: 8px; font-size: 16px; }}
    .value {{ background-color: #f8f8f8; padding: 12px 15px; border-radius: 8px; font-size: 15px; }}
    .message-value {{ white-space: pre-wrap; }}
    .footer {{ background-color: #28293D; color: white; padding: 20px; text-align: center; font-size: 14px; }}
    .footer a {{ color: #DAAA52; text-decoration: none; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <div class="site-title">{site_name}</div>
      <h2>New Contact Form Submission</h2>
    </div>
    <div class="content">
      <div class="accent-box">
        You have received a new inquiry from the {site_name} website contact form.
      </div>
{fields}
    </div>
    <div class="footer">
      <p>This message was sent from the {site_name} website contact form</p>
      <p>To reply directly, email <a href="mailto:{email}">{email}</a></p>
    </div>
  </div>
</body>
</html>
"""

FIELD_TEMPLATE = """      <div class="field">
        <div class="label">{label}:</div>
        <div class="value{extra_class}">{value}</div>
      </div>"""

FIELD_LABELS = [
    ("name", "Name"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("subject", "Subject"),
    ("message", "Message"),
]


def render_text(submission: Submission) -> str:
    return (
        f"Name: {submission.name}\n"
        f"Email: {submission.email}\n"
        f"Phone: {submission.phone}\n"
        f"Subject: {submission.subject}\n"
        f"\n"
        f"Message:\n"
        f"{submission.message}\n"
        f"\n"
        f"(This message was sent from {submission.email})\n"
    )


def render_html(submission: Submission, site_name: str) -> str:
    """Field values are HTML-escaped before being placed in the template."""
    fields = "\n".join(
        FIELD_TEMPLATE.format(
            label=label,
            value=escape(getattr(submission, attr)),
            extra_class=" message-value" if attr == "message" else "",
        )
        for attr, label in FIELD_LABELS
    )
    return HTML_TEMPLATE.format(
        site_name=escape(site_name),
        email=escape(submission.email),
        fields=fields,
    )
