#!/usr/bin/env python3

import aws_cdk as cdk

from bus_reservation_stack import BusReservationStack
from pipeline_stack import PipelineStack

app = cdk.App()
BusReservationStack(
    app,
    "BusReservationStack",
)

PipelineStack(app, "PipelineStack")

app.synth()
