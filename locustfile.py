from locust import HttpUser, task, between


"""
HighlightUser class simulates a user who sends POST requests to /api/v1/highlight.

@task — tells Locust to run this method.

payload — two texts that differ in a few positions.

catch_response=True — allows checking if the response is valid (status 200).
"""


class HighlightUser(HttpUser):
    wait_time = between(1, 3)

    @task
    def run_highlight(self):
        payload = {
            "text1": "The quick brown fox jumps over the lazy dog. " * 20,
            "text2": "The quick red fox jumps over the sleepy dog. " * 20,
        }

        with self.client.post(
                "/api/v1/highlight",
                json=payload,
                catch_response=True
        ) as response:
            if response.status_code == 200:
                response.success()
            else:
                response.failure(f"Failed: {response.status_code} - {response.text}")
