from django.contrib import admin

from .models import Influencer, Registration


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ('txnid', 'name', 'email', 'batch', 'amount', 'payment_status', 'created_at')
    list_filter = ('payment_status', 'batch', 'state')
    search_fields = ('txnid', 'name', 'email', 'phone', 'payu_txn_id')
    readonly_fields = ('txnid', 'created_at')
    ordering = ('-created_at',)


@admin.register(Influencer)
class InfluencerAdmin(admin.ModelAdmin):
    list_display = ('ref_code', 'name', 'email', 'phone', 'created_at')
    search_fields = ('ref_code', 'name', 'email')
    readonly_fields = ('ref_code', 'created_at')
