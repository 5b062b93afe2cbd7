"""Supabase-backed daily API call counter."""

from dataclasses import dataclass

from supabase import Client

from grocery_budget.services.quota import ApiCallCounter


@dataclass
class SupabaseApiCallCounter(ApiCallCounter):
    """Stores per-day external call counts in the api_call_limits table."""

    client: Client

    def get_count(self, date_key: str) -> int:
        """Return the stored count for a day, zero if no row exists."""
        response = (
            self.client.table("api_call_limits")
            .select("call_count")
            .eq("date", date_key)
            .limit(1)
            .execute()
        )
        if response.data:
            return int(response.data[0].get("call_count", 0))
        return 0

    def increment(self, date_key: str) -> None:
        """Increment the count for a day, creating the row on first use.

        This is a read followed by a write, so concurrent increments for the
        same day can be lost.
        """
        response = (
            self.client.table("api_call_limits")
            .select("call_count")
            .eq("date", date_key)
            .limit(1)
            .execute()
        )
        if response.data:
            current = int(response.data[0].get("call_count", 0))
            self.client.table("api_call_limits").update(
                {"call_count": current + 1}
            ).eq("date", date_key).execute()
            return
        self.client.table("api_call_limits").insert(
            {"date": date_key, "call_count": 1}
        ).execute()
