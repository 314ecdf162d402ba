"""Invite Email — renders the approval notification (subject, HTML, plain text).

Invariants:
    - Pure: no IO, the caller provides the code, expiry and recipient name
    - Recipient name is HTML-escaped before interpolation
    - Expiry is shown in the timezone carried by the datetime (UTC from the service)
"""

from dataclasses import dataclass
from datetime import datetime
from html import escape

SUBJECT_TEMPLATE = "Your Founders Club Invite Code — {brand}"

USAGE_STEPS = (
    "Go to the {brand} product selection page",
    'Click "Enter Code" on the Founders Club card',
    "Enter your code and email to unlock access",
    "Enjoy exclusive Founders Club benefits!",
)

BENEFITS = (
    '✨ Exclusive "Founders" tag on your NFC card',
    "🎨 Access to exclusive Black card colors",
    "💰 Lifetime 50% discount on all products",
    "⚡ Priority 24/7 support",
    "🚀 Early access to new features",
)


@dataclass(frozen=True)
class InviteEmail:
    subject: str
    html: str
    text: str


def format_expiry(expires_at: datetime) -> str:
    """e.g. 'Wednesday, October 21, 2026 at 02:30 PM UTC'."""
    tz = expires_at.strftime("%Z") or "UTC"
    return (
        f"{expires_at.strftime('%A, %B')} {expires_at.day}, "
        f"{expires_at.year} at {expires_at.strftime('%I:%M %p')} {tz}"
    )


def render_invite_email(
    name: str,
    code: str,
    expires_at: datetime,
    ttl_hours: int,
    brand: str = "Linkist",
    product_selection_url: str = "https://linkist.ai/product-selection",
) -> InviteEmail:
    """Build the approval email for one recipient."""
    expiry = format_expiry(expires_at)
    steps = [s.format(brand=brand) for s in USAGE_STEPS]
    return InviteEmail(
        subject=SUBJECT_TEMPLATE.format(brand=brand),
        html=_render_html(
            escape(name), code, expiry, ttl_hours, brand, product_selection_url, steps,
        ),
        text=_render_text(name, code, expiry, ttl_hours, brand, product_selection_url, steps),
    )


def _render_text(
    name: str, code: str, expiry: str, ttl_hours: int,
    brand: str, url: str, steps: list[str],
) -> str:
    lines = [
        f"Hi {name},",
        "",
        f"Great news! Your request to join the exclusive {brand} Founders Club has been approved.",
        "",
        f"Your invite code: {code}",
        "",
        f"Important: This code expires on {expiry}. Please use it within {ttl_hours} hours.",
        "",
        "How to use your code:",
        *[f"{i}. {step}" for i, step in enumerate(steps, start=1)],
        "",
        "Your Founders Club Benefits:",
        *[f"- {benefit}" for benefit in BENEFITS],
        "",
        f"Unlock Founders Club access: {url}",
    ]
    return "\n".join(lines)


def _render_html(
    name: str, code: str, expiry: str, ttl_hours: int,
    brand: str, url: str, steps: list[str],
) -> str:
    step_items = "\n".join(
        f'          <li style="margin-bottom: 10px;">{escape(step)}</li>' for step in steps
    )
    benefit_items = "\n".join(
        f'          <li style="margin-bottom: 8px;">{escape(b)}</li>' for b in BENEFITS
    )
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Your Founders Club Invite Code</title>
</head>
<body style="margin: 0; padding: 0; font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background-color: #f4f4f4;">
  <table role="presentation" width="100%" cellspacing="0" cellpadding="0" style="max-width: 600px; margin: 0 auto; background-color: #ffffff;">
    <tr>
      <td style="padding: 40px 30px; text-align: center; background: linear-gradient(135deg, #f59e0b 0%, #d97706 100%);">
        <h1 style="color: #ffffff; margin: 0; font-size: 28px;">Welcome to Founders Club</h1>
      </td>
    </tr>
    <tr>
      <td style="padding: 40px 30px;">
        <p style="color: #333333; font-size: 16px; line-height: 24px;">Hi {name},</p>
        <p style="color: #333333; font-size: 16px; line-height: 24px;">
          Great news! Your request to join the exclusive {escape(brand)} Founders Club has been approved.
        </p>
        <p style="color: #333333; font-size: 16px; line-height: 24px;">
          Use the following invite code to unlock your Founders Club access:
        </p>
        <div style="background-color: #fef3c7; border: 2px dashed #f59e0b; border-radius: 12px; padding: 25px; text-align: center; margin: 0 0 30px;">
          <p style="color: #92400e; font-size: 14px; margin: 0 0 10px; text-transform: uppercase; letter-spacing: 1px;">Your Invite Code</p>
          <p style="color: #78350f; font-size: 32px; font-weight: bold; margin: 0; font-family: monospace; letter-spacing: 3px;">{code}</p>
        </div>
        <div style="background-color: #fef2f2; border-left: 4px solid #ef4444; padding: 15px; margin: 0 0 30px;">
          <p style="color: #991b1b; font-size: 14px; margin: 0;">
            <strong>Important:</strong> This code expires on {expiry}. Please use it within {ttl_hours} hours.
          </p>
        </div>
        <h3 style="color: #333333; font-size: 18px;">How to use your code:</h3>
        <ol style="color: #666666; font-size: 14px; line-height: 24px; padding-left: 20px;">
{step_items}
        </ol>
        <h3 style="color: #333333; font-size: 18px;">Your Founders Club Benefits:</h3>
        <ul style="color: #666666; font-size: 14px; line-height: 24px; padding-left: 20px;">
{benefit_items}
        </ul>
        <div style="text-align: center;">
          <a href="{escape(url, quote=True)}" style="display: inline-block; background: linear-gradient(135deg, #f59e0b 0%, #d97706 100%); color: #ffffff; text-decoration: none; padding: 15px 40px; border-radius: 8px; font-weight: bold; font-size: 16px;">
            Unlock Founders Club Access →
          </a>
        </div>
      </td>
    </tr>
    <tr>
      <td style="padding: 30px; background-color: #f9fafb; text-align: center;">
        <p style="color: #6b7280; font-size: 12px; margin: 0;">
          This email was sent to you because you requested access to {escape(brand)} Founders Club.
        </p>
      </td>
    </tr>
  </table>
</body>
</html>"""
