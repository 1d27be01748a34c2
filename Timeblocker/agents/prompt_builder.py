"""
Prompt builder for the natural-language time resolver.
Builds the message lists for the duration and datetime exchanges.
"""

from __future__ import annotations

from datetime import datetime

DURATION_LEAD_IN = "The JSON in the next message contains the duration of a meeting:"


class PromptBuilder:
    """Builds chat messages describing a single time expression"""

    def __init__(self, time_expression: str):
        self.time_expression = time_expression

    def get_duration_prompt(self) -> str:
        return f"""The following text contains a duration in minutes, hours, or days. What is the duration?

Output the duration in JSON with the following format: {{"minutes": <minutes>, "hours": <hours>, "days": <days>}}
Leave out any unit that the text does not mention. Do not convert days to hours or hours to minutes.

Here is the text:

{self.time_expression}"""

    def get_datetime_prompt(
        self, now: datetime, previous_end: datetime | None = None
    ) -> str:
        """Datetime question, anchored on today or on the previous meeting's end"""
        output_rules = (
            "What is the date and time of the meeting? "
            "(Do not add the duration of the meeting to the start time.) "
            "Format the response as JSON and include a `datetime` field with the "
            "date and time of the meeting in ISO-8601 format."
        )
        if previous_end is None:
            today = now.strftime("%A %m/%d/%Y, %I:%M %p")
            return (
                f"Today is {today} and your colleague is scheduling a meeting AFTER today. "
                f"The meeting is {self.time_expression}. {output_rules}"
            )

        previous = previous_end.strftime("%A %m/%d/%Y, %I:%M %p")
        return (
            f"Your colleague is scheduling a meeting. The previous meeting ended at {previous} "
            f"({previous_end.isoformat(timespec='minutes')}). "
            "The following information will include the duration of the new meeting and may "
            f"include the day and/or time when the new meeting should start: {self.time_expression}. "
            "If the new meeting time is specified, use that time; otherwise schedule the meeting "
            f"to start when the previous meeting ended. {output_rules}"
        )

    def duration_messages(self) -> list[dict]:
        return [{"role": "user", "content": self.get_duration_prompt()}]

    def datetime_messages(
        self,
        duration_reply: str,
        now: datetime,
        previous_end: datetime | None = None,
    ) -> list[dict]:
        """Messages for the second exchange, carrying the first exchange's raw reply"""
        return [
            {"role": "user", "content": DURATION_LEAD_IN},
            {"role": "user", "content": duration_reply},
            {"role": "user", "content": self.get_datetime_prompt(now, previous_end)},
        ]
