"""Authorization actions: all operations subject to access control."""

from enum import StrEnum


class Resource(StrEnum):
    """Kinds of resource an action can be scoped to."""

    NOTIFICATION_EVENT = "notification_event"
    USER = "user"
    TEAM = "team"
    ANNOUNCEMENT = "announcement"
    PLAN = "plan"
    ENTERPRISE_GROUP = "enterprise_group"
    INVITATION = "invitation"
    EMAIL_CHANGE_REQUEST = "email_change_request"
    NOTIFICATION = "notification"
    SUBSCRIPTION = "subscription"


class Action(StrEnum):
    """Structured enum of all authorization-relevant operations."""

    # Notification events
    NOTIFICATION_EVENT_INDEX = "notification_event:index"
    NOTIFICATION_EVENT_SHOW = "notification_event:show"
    NOTIFICATION_EVENT_NEW = "notification_event:new"
    NOTIFICATION_EVENT_CREATE = "notification_event:create"

    # Users
    USER_INDEX = "user:index"
    USER_SHOW = "user:show"
    USER_SET_STATUS = "user:set_status"
    USER_IMPERSONATE = "user:impersonate"
    USER_DESTROY = "user:destroy"

    # Teams
    TEAM_SHOW = "team:show"
    TEAM_CREATE = "team:create"
    TEAM_UPDATE = "team:update"
    TEAM_DESTROY = "team:destroy"
    TEAM_ADMIN_ACCESS = "team:admin_access"

    # Announcements (super admin only)
    ANNOUNCEMENT_INDEX = "announcement:index"
    ANNOUNCEMENT_SHOW = "announcement:show"
    ANNOUNCEMENT_NEW = "announcement:new"
    ANNOUNCEMENT_CREATE = "announcement:create"
    ANNOUNCEMENT_EDIT = "announcement:edit"
    ANNOUNCEMENT_UPDATE = "announcement:update"
    ANNOUNCEMENT_DESTROY = "announcement:destroy"

    # Plans (super admin only)
    PLAN_INDEX = "plan:index"
    PLAN_SHOW = "plan:show"
    PLAN_NEW = "plan:new"
    PLAN_CREATE = "plan:create"
    PLAN_EDIT = "plan:edit"
    PLAN_UPDATE = "plan:update"
    PLAN_DESTROY = "plan:destroy"

    # Enterprise groups
    ENTERPRISE_GROUP_INDEX = "enterprise_group:index"
    ENTERPRISE_GROUP_SHOW = "enterprise_group:show"
    ENTERPRISE_GROUP_NEW = "enterprise_group:new"
    ENTERPRISE_GROUP_CREATE = "enterprise_group:create"
    ENTERPRISE_GROUP_EDIT = "enterprise_group:edit"
    ENTERPRISE_GROUP_UPDATE = "enterprise_group:update"
    ENTERPRISE_GROUP_DESTROY = "enterprise_group:destroy"

    # Team invitations
    INVITATION_INDEX = "invitation:index"
    INVITATION_SHOW = "invitation:show"
    INVITATION_CREATE = "invitation:create"
    INVITATION_RESEND = "invitation:resend"
    INVITATION_REVOKE = "invitation:revoke"
    INVITATION_ACCEPT = "invitation:accept"
    INVITATION_DECLINE = "invitation:decline"

    # Email change requests
    EMAIL_CHANGE_REQUEST_INDEX = "email_change_request:index"
    EMAIL_CHANGE_REQUEST_SHOW = "email_change_request:show"
    EMAIL_CHANGE_REQUEST_CREATE = "email_change_request:create"
    EMAIL_CHANGE_REQUEST_APPROVE = "email_change_request:approve"
    EMAIL_CHANGE_REQUEST_REJECT = "email_change_request:reject"

    # In-app notifications (recipient only)
    NOTIFICATION_SHOW = "notification:show"
    NOTIFICATION_MARK_AS_READ = "notification:mark_as_read"
    NOTIFICATION_DESTROY = "notification:destroy"

    # Billing subscription of the acting user
    SUBSCRIPTION_SHOW = "subscription:show"
    SUBSCRIPTION_EDIT = "subscription:edit"
    SUBSCRIPTION_UPDATE = "subscription:update"
    SUBSCRIPTION_DESTROY = "subscription:destroy"

    @property
    def resource(self) -> Resource:
        return Resource(self.value.split(":", 1)[0])

    @property
    def operation(self) -> str:
        return self.value.split(":", 1)[1]
