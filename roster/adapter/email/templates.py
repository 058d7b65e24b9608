"""HTML email templates.

Placeholders use ``${name}`` syntax and are filled with ``string.Template``.
"""

from string import Template

from roster.adapter.error import TemplateError

_HEADER = """<!DOCTYPE html>
<html>
  <body style="font-family: Arial, sans-serif; color: #1f2933;">
    <div style="max-width: 560px; margin: 0 auto; padding: 24px;">
"""

_FOOTER = """
      <p style="color: #7b8794; font-size: 12px;">
        If you were not expecting this email, you can ignore it.
      </p>
    </div>
  </body>
</html>
"""

_CODE_BLOCK = """
      <p>Your verification code:</p>
      <p style="font-size: 28px; letter-spacing: 6px;"><strong>${otp}</strong></p>
      <p>Club reference code: <strong>${refCode}</strong></p>
      <p><a href="${frontendUrl}/register">Complete your registration</a></p>
"""

_BODIES = {
    "invite-club": """
      <h2>Welcome to Roster</h2>
      <p>${email} has been invited to set up a club on Roster.</p>
"""
    + _CODE_BLOCK,
    "invite-player-supporter": """
      <h2>${clubName} invited you</h2>
      <p>${clubName} would like you to join them as a ${userRole}.</p>
"""
    + _CODE_BLOCK,
    "invite-company": """
      <h2>${clubName} invited your company</h2>
      <p>${clubName} would like your company to join them as an affiliate.</p>
"""
    + _CODE_BLOCK,
    "decline-affiliate-invite": """
      <h2>Your invitation was declined</h2>
      <p>An administrator declined your affiliate invitation.
      Your pending account has been removed.</p>
""",
}

TEMPLATES: dict[str, Template] = {
    name: Template(_HEADER + body + _FOOTER) for name, body in _BODIES.items()
}


def render(name: str, variables: dict[str, str]) -> str:
    """Render a template by name.

    Args:
        name: Template name
        variables: Values for the template placeholders

    Returns:
        Rendered HTML

    Raises:
        TemplateError: If the template is unknown or a placeholder has no value
    """
    template = TEMPLATES.get(name)
    if template is None:
        raise TemplateError(f"Unknown email template: {name}")
    try:
        return template.substitute(variables)
    except KeyError as e:
        raise TemplateError(f"Missing variable {e} for template {name}") from e
