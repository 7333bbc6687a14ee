# =============================================================================
# lib/email_templates.py - Application Notification Content
# =============================================================================
# Builds the subject line, HTML body and plain-text body for a new
# application notification. Both bodies carry the same fields:
# applicant name, email, position, team, submission time, then the optional
# cover letter and resume blocks, then a fixed footer.
# =============================================================================

from datetime import datetime
from html import escape

from core.models.application import Application

TIME_FORMAT = "%B %d, %Y %I:%M %p UTC"


def format_applied_at(applied_at: datetime) -> str:
    """Human-readable submission time, e.g. 'January 15, 2024 10:30 AM UTC'."""
    return applied_at.strftime(TIME_FORMAT)


def single_line(value: str | None) -> str:
    """Collapse line breaks and runs of whitespace to single spaces."""
    return " ".join((value or "").split())


def build_subject(application: Application) -> str:
    """Subject line; header values cannot span lines."""
    position = single_line(application.position)
    name = single_line(application.applicant_name)
    return f"New Application: {position} - {name}"


def build_html(application: Application, app_name: str) -> str:
    """
    HTML body with inline styles (mail clients ignore <style> blocks).

    Every user-supplied value is escaped.
    """
    name = escape(application.applicant_name or "")
    email = escape(application.applicant_email or "")
    position = escape(application.position or "")
    team = escape(application.team or "")
    applied_at = escape(format_applied_at(application.applied_at))

    cover_letter_block = ""
    if application.cover_letter:
        cover_letter_block = f"""
        <div style="background-color: #fff; padding: 20px; border-left: 4px solid #007bff; margin: 20px 0;">
          <h3 style="color: #333; margin-top: 0;">Cover Letter</h3>
          <p style="white-space: pre-wrap;">{escape(application.cover_letter)}</p>
        </div>
"""

    resume_block = ""
    if application.resume_url:
        resume_block = f"""
        <div style="margin: 20px 0;">
          <h3 style="color: #333;">Resume</h3>
          <p><a href="{escape(application.resume_url)}" style="color: #007bff; text-decoration: none;">View Resume</a></p>
        </div>
"""

    return f"""
      <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h2 style="color: #333; border-bottom: 2px solid #007bff; padding-bottom: 10px;">
          New Job Application Received
        </h2>

        <div style="background-color: #f8f9fa; padding: 20px; border-radius: 5px; margin: 20px 0;">
          <h3 style="color: #007bff; margin-top: 0;">Applicant Information</h3>
          <p><strong>Name:</strong> {name}</p>
          <p><strong>Email:</strong> <a href="mailto:{email}">{email}</a></p>
          <p><strong>Position:</strong> {position}</p>
          <p><strong>Team:</strong> {team}</p>
          <p><strong>Applied At:</strong> {applied_at}</p>
        </div>
{cover_letter_block}{resume_block}
        <div style="background-color: #e9ecef; padding: 15px; border-radius: 5px; margin-top: 30px; text-align: center;">
          <p style="margin: 0; color: #6c757d; font-size: 12px;">
            This is an automated notification from the {escape(app_name)}
          </p>
        </div>
      </div>
"""


def build_text(application: Application, app_name: str) -> str:
    """Plain-text alternative of build_html."""
    lines = [
        "New Job Application Received",
        "",
        "Applicant Information:",
        f"Name: {application.applicant_name}",
        f"Email: {application.applicant_email}",
        f"Position: {application.position}",
        f"Team: {application.team}",
        f"Applied At: {format_applied_at(application.applied_at)}",
        "",
    ]

    if application.cover_letter:
        lines += ["Cover Letter:", application.cover_letter, ""]

    if application.resume_url:
        lines += [f"Resume: {application.resume_url}", ""]

    lines += ["---", f"This is an automated notification from the {app_name}"]
    return "\n".join(lines)
