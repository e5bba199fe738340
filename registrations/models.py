from django.db import models


class Registration(models.Model):
    INITIATED = 'INITIATED'
    SUCCESS = 'SUCCESS'
    FAILED = 'FAILED'

    STATUS_CHOICES = [
        (INITIATED, 'Initiated'),
        (SUCCESS, 'Success'),
        (FAILED, 'Failed'),
    ]

    txnid = models.CharField(max_length=64, unique=True)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=20)
    profession = models.CharField(max_length=255)
    state = models.CharField(max_length=100)
    batch = models.CharField(max_length=100)
    language = models.CharField(max_length=50, blank=True, default='')
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    payment_status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=INITIATED)
    payu_txn_id = models.CharField(max_length=100, blank=True, null=True)
    # Read by the influencer stats; nothing writes it yet
    referral = models.CharField(max_length=32, blank=True, null=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'registrations'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.txnid} - {self.email} - {self.payment_status}"


class Influencer(models.Model):
    ref_code = models.CharField(max_length=32, unique=True)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'influencers'

    def __str__(self):
        return f"{self.ref_code} - {self.name}"
